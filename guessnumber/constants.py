"""Game constants and configuration."""

# Window settings
WINDOW_TITLE = "Guess the Number Game"
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 360
FPS = 30

# Gameplay
MINIMUM_GUESS_VALUE = 1
NUMBER_RANGE = 100
LOWEST_SCORE = 0
EXIT_STATUS = 0

# Feedback log, relative to the working directory
FEEDBACK_FILE = "feedback.txt"

# Colors - Light theme
COLOR_BACKGROUND = (245, 245, 248)
COLOR_TEXT = (40, 40, 50)
COLOR_TEXT_MUTED = (120, 120, 130)
COLOR_TEXT_HIGHLIGHT = (180, 120, 0)  # Dark gold/amber for results
COLOR_BUTTON = (100, 130, 180)  # Blue-grey buttons
COLOR_BUTTON_HOVER = (120, 150, 200)
COLOR_BUTTON_TEXT = (255, 255, 255)
COLOR_MENU_BAR = (225, 225, 232)
COLOR_MENU_ITEM_HOVER = (200, 210, 230)
COLOR_FIELD = (255, 255, 255)
COLOR_FIELD_BORDER = (150, 150, 160)
COLOR_FIELD_FOCUS = (70, 130, 180)
COLOR_DIALOG = (250, 250, 252)
COLOR_DIALOG_BORDER = (80, 80, 100)
COLOR_OVERLAY = (0, 0, 0, 90)

# UI Layout
MENU_BAR_HEIGHT = 26
MENU_ITEM_WIDTH = 170
MENU_ITEM_HEIGHT = 26
MENU_SEPARATOR_HEIGHT = 9
TEXT_FIELD_WIDTH = 140
TEXT_FIELD_HEIGHT = 34
BUTTON_WIDTH = 150
BUTTON_HEIGHT = 36
DIALOG_BUTTON_WIDTH = 90
DIALOG_PADDING = 16
FEEDBACK_AREA_ROWS = 6
CURSOR_BLINK_INTERVAL = 500  # ms
