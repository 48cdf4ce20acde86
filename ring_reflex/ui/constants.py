"""Window defaults and color definitions."""

# Timing
FPS = 60

# Window
SCREEN_W = 800
SCREEN_H = 600

# Colors
BG_COLOR = (0, 0, 0)
BG_INCORRECT = (139, 0, 0)  # darkred
HEADER_LINE = (255, 255, 255)
HEADER_TEXT = (255, 255, 255)
NODE_ACTIVE = (255, 255, 255)
NODE_INACTIVE = (169, 169, 169)  # darkgrey
NODE_LABEL = (0, 0, 0)
HOVER_OUTLINE = (173, 216, 230)  # lightblue
BURST_COLOR = (255, 255, 0)

# Stroke widths and font sizes
HEADER_LINE_W = 2
HOVER_LINE_W = 3
BURST_LINE_W = 3
HEADER_FONT_SIZE = 32
LABEL_FONT_SIZE = 26
