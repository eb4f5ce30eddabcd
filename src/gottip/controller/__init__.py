"""
The CONTROLLER layer owns the mutable application state.
It routes user edits through the model and notifies the views via Qt signals.
"""
