"""A software oscilloscope: a sampled sine signal on a scrolling matplotlib plot."""

__version__ = "0.1.0"
__all__ = ["signal_data", "sampling", "controls", "plot", "image_viewer", "app"]