"""Echo servers and clients over TCP and UDP, a simple logger, linked lists and sorting routines."""

__version__ = "0.1.0"
__all__ = ["doubly_linked", "log", "singly_linked", "sorting", "tcp", "udp"]