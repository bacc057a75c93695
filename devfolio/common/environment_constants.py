# Names of the environment variables the service reads at wiring time.
DATABASE_URL = "DATABASE_URL"

AUTH_URL = "AUTH_URL"
AUTH_API_KEY = "AUTH_API_KEY"
AUTH_JWT_SECRET = "AUTH_JWT_SECRET"
AUTH_JWT_AUDIENCE = "AUTH_JWT_AUDIENCE"

LOG_LEVEL = "LOG_LEVEL"
