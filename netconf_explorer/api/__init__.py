from .console import prepare_commit, prepare_edit, prepare_get, send_request

__all__ = ("prepare_get", "prepare_edit", "prepare_commit", "send_request")
