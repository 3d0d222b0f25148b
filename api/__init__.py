"""
API package - command boundary used by the host UI.
"""

from api.commands import COMMANDS, invoke, invoke_async

__all__ = ["COMMANDS", "invoke", "invoke_async"]
