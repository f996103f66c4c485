from filesystem_visitor import FileElement, FolderElement, NamePrinter, SizeCalculator


def sample_tree():
    return FolderElement("root", [
        FileElement("a.txt", 10),
        FileElement("b.txt", 20),
        FolderElement("nested", [FileElement("c.txt", 5)]),
    ])


def test_size_calculator_sums_whole_subtree():
    calculator = SizeCalculator()
    sample_tree().accept(calculator)
    assert calculator.get_total_size() == 35


def test_size_calculator_on_single_file():
    calculator = SizeCalculator()
    FileElement("only", 7).accept(calculator)
    assert calculator.get_total_size() == 7


def test_size_calculator_accumulates_across_traversals():
    calculator = SizeCalculator()
    tree = sample_tree()
    tree.accept(calculator)
    tree.accept(calculator)
    assert calculator.get_total_size() == 70


def test_empty_folder():
    calculator = SizeCalculator()
    FolderElement("empty").accept(calculator)
    assert calculator.get_total_size() == 0


def test_name_printer_is_pre_order():
    printer = NamePrinter()
    sample_tree().accept(printer)
    assert printer.lines == [
        "📁 Folder: root",
        "📄 File: a.txt",
        "📄 File: b.txt",
        "📁 Folder: nested",
        "📄 File: c.txt",
    ]


def test_visitation_does_not_modify_tree():
    tree = sample_tree()
    tree.accept(SizeCalculator())
    tree.accept(NamePrinter())
    assert [child.name for child in tree.children] == ["a.txt", "b.txt", "nested"]
    assert tree.children[2].children[0].size == 5


def test_default_children_are_not_shared():
    first = FolderElement("x")
    second = FolderElement("y")
    first.children.append(FileElement("f", 1))
    assert second.children == []
