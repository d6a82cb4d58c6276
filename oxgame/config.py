# -----------------------------------------------------------------------------
# BOARD / SURFACE
# -----------------------------------------------------------------------------

BOARD_SIZE = 3                 # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
SURFACE_SIZE = 300             # canvas is 300x300 px

# -----------------------------------------------------------------------------
# PENS
# -----------------------------------------------------------------------------

STROKE_COLOR = "black"
MARK_PADDING = 20              # inset of a mark inside its cell
MARK_PEN_WIDTH = 5
GRID_PEN_WIDTH = 2

# -----------------------------------------------------------------------------
# TIMING (ms)
# -----------------------------------------------------------------------------

GRID_LINE_MS = 300             # per grid segment
SETTLE_DELAY_MS = 500          # extra lock after the grid is drawn
MARK_A_STROKE_MS = 180         # per X stroke
MARK_A_TOTAL_MS = 400          # X strokes + post-draw hold
MARK_B_REVEAL_MS = 360

# -----------------------------------------------------------------------------
# LABELS
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Ox Game"
MARK_A_LABEL = "X"
MARK_B_LABEL = "O"
