"""
Application settings read from the environment.
"""

import os

# Monte Carlo settings
SIMULATION_ITERATIONS = int(os.getenv("SIMULATION_ITERATIONS", "500"))
MAX_SIMULATION_ITERATIONS = int(os.getenv("MAX_SIMULATION_ITERATIONS", "20000"))
SIMULATION_VARIANCE = float(os.getenv("SIMULATION_VARIANCE", "0.2"))

# Remote platform settings
PROVIDER_TIMEOUT = float(os.getenv("PROVIDER_TIMEOUT", "30.0"))

# ESPN private league cookies (optional)
ESPN_S2 = os.getenv("ESPN_S2", "")
ESPN_SWID = os.getenv("ESPN_SWID", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# In production, replace with specific frontend URL
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
