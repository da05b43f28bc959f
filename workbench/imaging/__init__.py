"""Matrices, PPM images, seam-carving resizing and the resize command."""