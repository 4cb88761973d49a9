"""CPU and disk scheduling simulators and a two-pass SIC assembler."""

__version__ = "0.1.0"
__all__ = ["cpu_scheduling", "disk_scheduling", "assembler"]