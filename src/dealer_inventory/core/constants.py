from __future__ import annotations

# Dealer export (Frazer/DealerCarSearch) column names
COL_VIN = "Vehicle Vin"
COL_MAKE = "Vehicle Make"
COL_MODEL = "Vehicle Model"
COL_TRIM = "Vehicle Trim Level"
COL_YEAR = "Vehicle Year"
COL_TYPE = "Vehicle Type"
COL_RETAIL = "Retail"
COL_IMAGE_URL = "Image URL"
COL_STOCK_NUMBER = "Stock Number"
COL_COMMENTS = "Comments"
COL_YOUTUBE_URL = "YouTube URL"
COL_EXTERIOR_COLOR = "Exterior Color"
COL_MILEAGE = "Mileage"
COL_MILES = "Miles"
COL_OPTION_LIST = "Option List"

# Valuation output columns, in append order
COL_MARKET_LOW = "Market1 Low"
COL_MARKET_HIGH = "Market1 High"
COL_WHOLESALE_LOW = "Wholesale1 Low"
COL_WHOLESALE_HIGH = "Wholesale1 High"
VALUATION_COLUMNS = (COL_MARKET_LOW, COL_MARKET_HIGH, COL_WHOLESALE_LOW, COL_WHOLESALE_HIGH)

# model JSON key -> output column
VALUATION_FIELD_MAP = {
    "market_low": COL_MARKET_LOW,
    "market_high": COL_MARKET_HIGH,
    "wholesale_low": COL_WHOLESALE_LOW,
    "wholesale_high": COL_WHOLESALE_HIGH,
}

DEFAULT_SENSITIVE_COLUMNS = ("cost", "total cost", "wholesale")
REDACTION_TOKEN = '"ZERO"'

# Facebook Commerce Manager catalog_products template (generic products, not vehicle_offer)
FB_CATALOG_HEADERS = (
    "id",
    "title",
    "description",
    "availability",
    "condition",
    "price",
    "link",
    "image_link",
    "brand",
    "google_product_category",
    "fb_product_category",
    "quantity_to_sell_on_facebook",
    "sale_price",
    "sale_price_effective_date",
    "item_group_id",
    "gender",
    "color",
    "size",
    "age_group",
    "material",
    "pattern",
    "shipping",
    "shipping_weight",
    "video[0].url",
    "video[0].tag[0]",
    "gtin",
    "product_tags[0]",
    "product_tags[1]",
    "style[0]",
)

FB_AVAILABILITY = "in stock"
FB_CONDITION = "used"
FB_GOOGLE_PRODUCT_CATEGORY = "Vehicles & Parts > Vehicles"
FB_PRODUCT_CATEGORY = "vehicles"
FB_VIDEO_TAG = "Test Drive"
PRICE_CURRENCY = "USD"

# Frazer writes 1000 miles when the odometer was never entered
MILEAGE_PLACEHOLDER = "1000"
OPTION_PLACEHOLDER = "Available"
MIN_COMMENT_CHARS = 10
