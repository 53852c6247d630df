"""Constants used for YAML run configuration parsing."""

# Data section keys
DATA_KEY = "data"
MAIN_FILE_KEY = "main"
XY_FILE_KEY = "xy"
YX_FILE_KEY = "yx"
SEPARATOR_KEY = "separator"
HEADER_KEY = "header"

# Polynomial section keys
POLYNOMIAL_KEY = "polynomial"
DEGREE_KEY = "degree"
DERIVATIVE_ORDER_KEY = "derivative_order"

# Spline section keys
SPLINE_KEY = "spline"
BOUNDARY_KEY = "boundary"
NATURAL_KEY = "natural"
START_KEY = "start"
START_END_KEY = "start_end"

# Output section keys
OUTPUT_KEY = "output"
PLOT_DIRECTORY_KEY = "plot_directory"
