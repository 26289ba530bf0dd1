"""Simulated GUI primitives that report what they would draw."""

from __future__ import annotations


def _report(message: str) -> str:
    line = f"[GUI] {message} (simulated)"
    print(line)
    return line


def init_gui() -> str:
    """Initialise the simulated GUI and return the reported line."""
    return _report("GUI initialized")


def draw_window(title: str, width: int, height: int) -> str:
    """Report drawing a window and return the reported line."""
    return _report(f"Window '{title}' drawn [{width} x {height}]")


def draw_label(text: str) -> str:
    """Report drawing a label and return the reported line."""
    return _report(f'Label: "{text}"')


def draw_button(label: str) -> str:
    """Report drawing a button and return the reported line."""
    return _report(f"Button: [{label}]")


def gui_message_loop() -> str:
    """Report running the message loop and return the reported line."""
    return _report("Message loop")