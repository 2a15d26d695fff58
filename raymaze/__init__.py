"""2D raycasting maze visualizer with a pseudo-3D first-person view."""
