import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Display symbol for deductions and salaries in reports
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")
