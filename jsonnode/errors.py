class DiagramError(Exception):
    pass


class ConfigurationError(DiagramError):
    pass


class LayoutOverflowError(DiagramError):
    pass


class CyclicStructureError(DiagramError):
    pass


class MeasurementError(DiagramError):
    pass


class UnsupportedValueKind(DiagramError):
    pass
