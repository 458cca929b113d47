"""Rendering subpackage.

Turns immutable ``State`` snapshots into images. See
:mod:`grid_snake.renderer.texture` for the Pillow board renderer.
"""
