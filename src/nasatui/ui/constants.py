# Search constants
SEARCH_DEBOUNCE_MS = 600  # Quiet period after the last keystroke before searching

# Infinite scroll constants
SCROLL_THRESHOLD_ROWS = 4  # Load more when the grid is this many rows from the bottom

# Grid constants
CARD_MIN_WIDTH = 28  # Minimum card width in cells, used to pick the column count

# Status messages
LOADING_MORE_MESSAGE = "Loading more..."
LOADING_MESSAGE = "Loading..."
END_OF_RESULTS_MESSAGE = "End of results"
