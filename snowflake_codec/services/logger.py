import logging

app_logger = logging.getLogger("snowflake-codec")

# Prevent duplicate logs if this module gets imported multiple times
if not app_logger.handlers:
  # Console handler
  console_handler = logging.StreamHandler()
  console_handler.setLevel(logging.DEBUG)

  # Formatter
  formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
  console_handler.setFormatter(formatter)

  app_logger.addHandler(console_handler)

# The level itself is set by config.py once the settings are loaded
app_logger.setLevel(logging.INFO)
app_logger.propagate = False
