"""
Shared constants for the project.

The column layout mirrors the upstream vendor feed and must not change:
positions are 0-based tab-separated field indices.
"""

# Number of tab-separated fields in a full feed row
FEED_COLUMN_COUNT = 24

# Field name -> column index
COL_UPC = 1
COL_CATEGORY_1 = 2
COL_BRAND = 3
COL_CATEGORY_2 = 5
COL_STANDARD_PRICE = 8
COL_WHOLESALE_COST = 10
COL_NAME = 20

FEED_COLUMNS = {
    'upc': COL_UPC,
    'category_1': COL_CATEGORY_1,
    'brand': COL_BRAND,
    'category_2': COL_CATEGORY_2,
    'standard_price': COL_STANDARD_PRICE,
    'wholesale_cost': COL_WHOLESALE_COST,
    'name': COL_NAME,
}

# Feed rows without a retail price are priced at wholesale cost times this
ZERO_PRICE_MARKUP = 2

# Amounts with more integer digits than this are treated as unusable cells
MAX_AMOUNT_INTEGER_DIGITS = 15
