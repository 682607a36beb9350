import os

# ============ CURRENCY ============
CURRENCY = os.getenv("EMI_CURRENCY", "INR")
LOCALE = os.getenv("EMI_LOCALE", "en_IN")

# ============ INPUT BOUNDS ============
# (min, max, step, default) for the slider of each paired input
LOAN_AMOUNT = (100000.0, 10000000.0, 10000.0, 1000000.0)
INTEREST_RATE = (1.0, 20.0, 0.1, 8.5)
LOAN_TENURE = (1.0, 30.0, 1.0, 20.0)

# ============ CHART ============
PRINCIPAL_COLOR = "#D4AF37"  # gold
INTEREST_COLOR = "#333333"  # dark gray
LEGEND_COLOR = "#E5E5E5"
CHART_FONT = "Inter, sans-serif"
