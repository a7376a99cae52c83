# Page geometry used when a reader has to synthesize coordinates.
LETTER_WIDTH_PT = 612
LETTER_HEIGHT_PT = 792

PAGE_MARGIN_PT = 72

# Fallback text height when no fragment carries one (synthetic input).
DEFAULT_TEXT_HEIGHT = 10.0
# Two fragments sit on the same visual line when their baselines differ by at
# most this ratio of the typical text height.
Y_TOLERANCE_RATIO = 0.5

UNKNOWN_FONT_NAME = "UnknownFont"
