"""Exception types raised by paneboard."""


class PaneboardError(Exception):
    """Base class for all paneboard errors."""


class LayoutError(PaneboardError, ValueError):
    """Invalid layout template or empty template set."""


class TerminalSizeError(PaneboardError, OSError):
    """The viewport size could not be queried."""
