"""Color token accessibility engine.

Parses hex color tokens, computes WCAG 2.1 luminance and contrast, validates
palettes for large-surface darkness, and derives opacity variants and
gradients.
"""

from .errors import (  # noqa: F401
    ColorTokenError,
    InvalidFormat,
    InvalidAlpha,
    InvalidDirection,
    StructuralPaletteError,
)
from .codec import Color, ColorLike, parse_hex, format_hex, as_color  # noqa: F401
from .luminance import relative_luminance  # noqa: F401
from .contrast import (  # noqa: F401
    ContrastResult,
    contrast_ratio,
    meets_aa,
    meets_aaa,
    check_contrast,
)
from .tone import is_pure_black, is_too_dark_for_large_areas  # noqa: F401
from .palette import (  # noqa: F401
    SHADE_KEYS,
    SEMANTIC_ROLES,
    BASE_SCALES,
    ColorScale,
    SemanticPalette,
    Palette,
)
from .derive import (  # noqa: F401
    RGBAColor,
    GradientStop,
    LinearGradient,
    GRADIENT_KEYWORDS,
    with_opacity,
    create_gradient,
    generate_color_variants,
    primary_gradient,
    secondary_gradient,
    surface_gradient,
)
from .validator import (  # noqa: F401
    ValidationIssue,
    ValidationReport,
    validate_palette,
    validate_contrast,
)
from .adaptive_contrast import accessible_text_color  # noqa: F401
from .loader import load_palette, default_palette  # noqa: F401
