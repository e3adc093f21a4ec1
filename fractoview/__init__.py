"""Mandelbrot, Julia and Burning Ship fractals: iteration, palettes, rendering and a Tk viewer."""

__version__ = "0.1.0"