"""Configuration, key bindings, input model and layout planning for inspecting evdev input devices."""

__version__ = "0.1.0"