"""
Computer Builder
================

Core Design: Assemble a computer configuration step by step through chained setter calls.

Design Patterns & Strategies Used:
1. Builder Pattern - Incremental construction of a Computer
2. Director Pattern - Named presets (gaming, office) replayed against any builder
3. Fluent Interface - Every setter returns the builder itself

Features:
- Partial configurations (unset parts render as "Not set")
- Swappable builders without touching preset logic
- Custom build path in the client function
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
import logging


NOT_SET = "Not set"


class ComputerType(Enum):
    GAMING = "gaming"
    OFFICE = "office"
    CUSTOM = "custom"


# ==================== PRODUCT ====================

class Computer:
    """Product assembled by a builder"""

    def __init__(self):
        self.cpu: Optional[str] = None
        self.ram: Optional[str] = None
        self.storage: Optional[str] = None
        self.gpu: Optional[str] = None
        self.power_supply: Optional[str] = None

    def get_specs(self) -> str:
        return "\n".join([
            "Computer specs:",
            f"- CPU: {self.cpu or NOT_SET}",
            f"- RAM: {self.ram or NOT_SET}",
            f"- Storage: {self.storage or NOT_SET}",
            f"- GPU: {self.gpu or NOT_SET}",
            f"- Power: {self.power_supply or NOT_SET}",
        ])

    def __str__(self) -> str:
        return self.get_specs()


# ==================== BUILDER PATTERN ====================

class ComputerBuilder(ABC):
    """Builder interface - each setter returns the builder for chaining"""

    @abstractmethod
    def set_cpu(self, cpu: str) -> 'ComputerBuilder':
        pass

    @abstractmethod
    def set_ram(self, ram: str) -> 'ComputerBuilder':
        pass

    @abstractmethod
    def set_storage(self, storage: str) -> 'ComputerBuilder':
        pass

    @abstractmethod
    def set_gpu(self, gpu: str) -> 'ComputerBuilder':
        pass

    @abstractmethod
    def set_power_supply(self, power: str) -> 'ComputerBuilder':
        pass

    @abstractmethod
    def build(self) -> Computer:
        pass


class GamingComputerBuilder(ComputerBuilder):
    """Concrete builder"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.computer = Computer()
        self.logger = logger or logging.getLogger(__name__)

    def set_cpu(self, cpu: str) -> 'GamingComputerBuilder':
        self.computer.cpu = cpu
        self.logger.info("CPU set: %s", cpu)
        return self

    def set_ram(self, ram: str) -> 'GamingComputerBuilder':
        self.computer.ram = ram
        self.logger.info("RAM set: %s", ram)
        return self

    def set_storage(self, storage: str) -> 'GamingComputerBuilder':
        self.computer.storage = storage
        self.logger.info("Storage set: %s", storage)
        return self

    def set_gpu(self, gpu: str) -> 'GamingComputerBuilder':
        self.computer.gpu = gpu
        self.logger.info("GPU set: %s", gpu)
        return self

    def set_power_supply(self, power: str) -> 'GamingComputerBuilder':
        self.computer.power_supply = power
        self.logger.info("Power supply set: %s", power)
        return self

    def build(self) -> Computer:
        self.logger.info("Computer assembled")
        return self.computer


# ==================== DIRECTOR ====================

class ComputerDirector:
    """Knows the preset setter sequences, works with any builder"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def build_gaming_pc(self, builder: ComputerBuilder) -> Computer:
        self.logger.info("Assembling gaming PC...")
        return (builder
                .set_cpu("Intel i9-13900K")
                .set_ram("32GB DDR5")
                .set_storage("2TB NVMe SSD")
                .set_gpu("NVIDIA RTX 4090")
                .set_power_supply("850W 80+ Gold")
                .build())

    def build_office_pc(self, builder: ComputerBuilder) -> Computer:
        self.logger.info("Assembling office PC...")
        return (builder
                .set_cpu("Intel i5-13400")
                .set_ram("16GB DDR4")
                .set_storage("512GB SSD")
                .set_power_supply("500W 80+ Bronze")
                .build())


def build_computer(builder: ComputerBuilder, computer_type: ComputerType) -> Computer:
    """Client entry point: pick a preset or a custom build"""
    director = ComputerDirector()

    if computer_type == ComputerType.GAMING:
        return director.build_gaming_pc(builder)
    elif computer_type == ComputerType.OFFICE:
        return director.build_office_pc(builder)
    elif computer_type == ComputerType.CUSTOM:
        return (builder
                .set_cpu("AMD Ryzen 7 5800X")
                .set_ram("16GB DDR4")
                .set_storage("1TB SSD")
                .set_gpu("AMD RX 6700 XT")
                .set_power_supply("650W 80+ Gold")
                .build())
    return builder.build()


# ==================== DEMONSTRATION ====================

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("COMPUTER BUILDER DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Gaming preset via director:")
    gaming = build_computer(GamingComputerBuilder(), ComputerType.GAMING)
    print(gaming.get_specs())
    print()

    print("2. Office preset (no GPU):")
    office = build_computer(GamingComputerBuilder(), ComputerType.OFFICE)
    print(office.get_specs())
    print()

    print("3. Partial manual build:")
    partial = GamingComputerBuilder().set_cpu("Apple M3").set_ram("8GB").build()
    print(partial.get_specs())
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Builder Pattern - Step-by-step construction")
    print("2. Director - Reusable presets over any builder")
    print("3. Fluent Interface - Chained setters")
    print("=" * 60)


if __name__ == "__main__":
    main()
