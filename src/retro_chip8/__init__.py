# src/retro_chip8/__init__.py
"""
CHIP-8 Virtual Machine Package
"""
__version__ = "0.1.0"
