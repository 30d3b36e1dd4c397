# src/jgeom/main.py
from .geometries import load_geometries
from .printer import PrintOptions, print_geometries


def show_geometries(stream=None, options: PrintOptions = PrintOptions()):
    tables = load_geometries()
    print_geometries(tables, stream=stream, options=options)
