"""
The VIEW layer contains the Qt widgets.
Widgets never compute anything themselves; they forward input to the
controller and redraw when it emits.
"""
