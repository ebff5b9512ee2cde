import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Display symbol for deductions and salaries in reports
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")
