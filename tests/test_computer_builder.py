import logging

from computer_builder import (
    NOT_SET,
    Computer,
    ComputerDirector,
    ComputerType,
    GamingComputerBuilder,
    build_computer,
)


def test_setters_return_builder_for_chaining():
    builder = GamingComputerBuilder()
    assert builder.set_cpu("x") is builder
    assert builder.set_ram("x") is builder
    assert builder.set_storage("x") is builder
    assert builder.set_gpu("x") is builder
    assert builder.set_power_supply("x") is builder


def test_last_value_set_wins():
    computer = (GamingComputerBuilder()
                .set_cpu("Intel i3")
                .set_cpu("Intel i7")
                .set_ram("8GB")
                .set_ram("64GB")
                .build())
    assert computer.cpu == "Intel i7"
    assert computer.ram == "64GB"


def test_unset_fields_render_sentinel():
    computer = GamingComputerBuilder().set_cpu("AMD Ryzen 5").build()
    specs = computer.get_specs()
    assert "CPU: AMD Ryzen 5" in specs
    assert f"RAM: {NOT_SET}" in specs
    assert f"GPU: {NOT_SET}" in specs
    assert f"Power: {NOT_SET}" in specs


def test_empty_computer_renders_without_error():
    specs = Computer().get_specs()
    assert specs.count(NOT_SET) == 5


def test_any_string_is_accepted():
    computer = GamingComputerBuilder().set_ram("").set_gpu("???").build()
    assert computer.gpu == "???"
    assert f"RAM: {NOT_SET}" in computer.get_specs()


def test_director_gaming_preset():
    computer = ComputerDirector().build_gaming_pc(GamingComputerBuilder())
    assert computer.cpu == "Intel i9-13900K"
    assert computer.ram == "32GB DDR5"
    assert computer.storage == "2TB NVMe SSD"
    assert computer.gpu == "NVIDIA RTX 4090"
    assert computer.power_supply == "850W 80+ Gold"


def test_director_office_preset_has_no_gpu():
    computer = ComputerDirector().build_office_pc(GamingComputerBuilder())
    assert computer.cpu == "Intel i5-13400"
    assert computer.gpu is None
    assert f"GPU: {NOT_SET}" in computer.get_specs()


def test_build_computer_custom():
    computer = build_computer(GamingComputerBuilder(), ComputerType.CUSTOM)
    assert computer.cpu == "AMD Ryzen 7 5800X"
    assert computer.gpu == "AMD RX 6700 XT"


def test_build_computer_presets_match_director():
    gaming = build_computer(GamingComputerBuilder(), ComputerType.GAMING)
    office = build_computer(GamingComputerBuilder(), ComputerType.OFFICE)
    assert gaming.gpu == "NVIDIA RTX 4090"
    assert office.power_supply == "500W 80+ Bronze"


def test_builder_logs_each_step(caplog):
    with caplog.at_level(logging.INFO, logger="computer_builder"):
        GamingComputerBuilder().set_cpu("Intel i9").build()
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["CPU set: Intel i9", "Computer assembled"]
