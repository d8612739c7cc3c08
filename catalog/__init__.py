from .collection import ShapeCatalog
from .config import CatalogConfig
from .factory import (
    ShapeKind,
    ShapeSpec,
    SELECTOR_CODES,
    kind_for_selector,
)
from .commands import (
    AddShape,
    RemoveShape,
    ShowShape,
    MeasureShape,
    DisplayAll,
    TranslateAll,
    ScaleAll,
    Quit,
    Command,
    CommandResult,
    execute,
)
from .logging_config import setup_logging
