"""Build stitch meshes from knit graphs and write them as OBJ files."""

__version__ = "0.1.0"

__all__ = ["__version__"]