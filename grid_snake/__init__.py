"""Tick-driven snake game engine on a wrap-around grid.

The public entry points are :func:`grid_snake.step.tick` and
:func:`grid_snake.systems.direction.enqueue_direction`, both pure reducers
over the immutable :class:`grid_snake.state.State`.
"""
