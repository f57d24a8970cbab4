"""
Lambda handler for the FarmHub API
Runs the FastAPI app on AWS Lambda through Mangum
"""
import logging

from mangum import Mangum

from farmhub.main import app

logger = logging.getLogger()
logger.setLevel(logging.INFO)

# API Gateway stage/function prefix removed before routing
BASE_PATH = "/default/farmhub-api"

handler_mangum = Mangum(app, lifespan="off")


def strip_base_path(event: dict, base_path: str = BASE_PATH) -> dict:
    """Remove the API Gateway base path from every path field of the event"""
    original_path = (
        event.get("rawPath")
        or event.get("path")
        or event.get("requestContext", {}).get("http", {}).get("path", "")
    )
    if not original_path.startswith(base_path):
        return event

    new_path = original_path[len(base_path):] or "/"
    if "rawPath" in event:
        event["rawPath"] = new_path
    if "path" in event:
        event["path"] = new_path
    if "http" in event.get("requestContext", {}):
        event["requestContext"]["http"]["path"] = new_path
    logger.info(f"Path rewritten: {original_path} -> {new_path}")
    return event


def handler(event, context):
    """Lambda entry point"""
    event = strip_base_path(event)
    response = handler_mangum(event, context)
    logger.info(f"Response status: {response.get('statusCode', 'N/A')}")
    return response
