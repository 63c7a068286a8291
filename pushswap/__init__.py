"""Sort integers with two stacks and a limited set of operations, with the
string, byte-buffer, stream and linked-list helpers it is built on."""

__version__ = "1.0.0"