# Brandmark logo generator

__version__ = "1.0.0"
