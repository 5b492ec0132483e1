from .http import HttpChatClient, build_headers, build_request

__all__ = ["HttpChatClient", "build_headers", "build_request"]
