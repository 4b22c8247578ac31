"""AWS Lambda entry point.

Mangum translates API Gateway events into ASGI requests for the FastAPI
app, so Lambda invocations take the same route as local HTTP requests.
"""

from mangum import Mangum

from src.api.main import app

# No ASGI lifespan events under Lambda
handler = Mangum(app, lifespan="off")
