"""
Filesystem Visitor
==================

Core Design: Run operations over a file/folder tree without changing the node classes.

Design Patterns & Strategies Used:
1. Visitor Pattern - Double dispatch on FileElement / FolderElement
2. Composite Pattern - Folders contain files and folders

Features:
- Total size calculation over a subtree
- Pre-order name listing
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging


# ==================== ELEMENTS ====================

class Element(ABC):

    @abstractmethod
    def accept(self, visitor: 'Visitor'):
        pass


class FileElement(Element):

    def __init__(self, name: str, size: int):
        self.name = name
        self.size = size

    def accept(self, visitor: 'Visitor'):
        visitor.visit_file(self)


class FolderElement(Element):

    def __init__(self, name: str, children: Optional[List[Element]] = None):
        self.name = name
        self.children: List[Element] = children if children is not None else []

    def accept(self, visitor: 'Visitor'):
        visitor.visit_folder(self)


# ==================== VISITOR PATTERN ====================

class Visitor(ABC):

    @abstractmethod
    def visit_file(self, file: FileElement):
        pass

    @abstractmethod
    def visit_folder(self, folder: FolderElement):
        pass


class SizeCalculator(Visitor):
    """Sums file sizes of everything reachable"""

    def __init__(self):
        self.total_size = 0

    def visit_file(self, file: FileElement):
        self.total_size += file.size

    def visit_folder(self, folder: FolderElement):
        for child in folder.children:
            child.accept(self)

    def get_total_size(self) -> int:
        return self.total_size


class NamePrinter(Visitor):
    """Emits one label per node, folder before its children"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.lines: List[str] = []
        self.logger = logger or logging.getLogger(__name__)

    def _emit(self, line: str):
        self.lines.append(line)
        self.logger.info(line)

    def visit_file(self, file: FileElement):
        self._emit(f"📄 File: {file.name}")

    def visit_folder(self, folder: FolderElement):
        self._emit(f"📁 Folder: {folder.name}")
        for child in folder.children:
            child.accept(self)


# ==================== DEMONSTRATION ====================

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("FILESYSTEM VISITOR DEMONSTRATION")
    print("=" * 60)
    print()

    root = FolderElement("root", [
        FileElement("readme.md", 10),
        FileElement("main.py", 20),
        FolderElement("docs", [FileElement("guide.md", 5)]),
    ])

    print("1. Names (pre-order):")
    root.accept(NamePrinter())
    print()

    print("2. Total size:")
    calculator = SizeCalculator()
    root.accept(calculator)
    print(f"Total: {calculator.get_total_size()} bytes")
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Visitor Pattern - Operations outside the node classes")
    print("2. Composite Pattern - Nested folders")
    print("=" * 60)


if __name__ == "__main__":
    main()
