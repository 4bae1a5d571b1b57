class PacketBoardError(Exception):
    """Base class for errors raised by packetboard itself."""


class DataAccessError(PacketBoardError):
    """Store unreachable, query rejected, or a row that could not be decoded."""
