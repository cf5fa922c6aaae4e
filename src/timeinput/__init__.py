"""Natural time input: parsing and formatting.

The core converts loosely formatted English input ("5", "2h30m", "next Friday at 5pm", "until Jan 1")
into a `TimerInput` (a duration or an absolute moment), and renders durations and moments back into
natural phrases. Everything here is pure: no I/O, no logging, no shared mutable state.
"""
