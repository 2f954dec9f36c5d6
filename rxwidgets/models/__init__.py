from .command_result import CommandResult, VisualState, resolve_visual_state

__all__ = ['CommandResult', 'VisualState', 'resolve_visual_state']
