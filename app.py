"""
Flask application factory for the inventory endpoints.

Every business route performs exactly one AWS call and wraps the result as
``{"version": ..., "data": ...}``.
"""
from typing import Any

from flask import Flask, Response, jsonify

from services.protocols import BucketLister, ParameterStore
from utils.decorators import remote_call


def envelope(version: str, data: Any) -> Response:
    """Wrap a payload in the versioned response envelope."""
    return jsonify({"version": version, "data": data})


def create_app(
    version: str,
    buckets: BucketLister,
    parameters: ParameterStore
) -> Flask:
    """
    Build the Flask app with the four routes bound to the given services.

    Args:
        version: Version string echoed in every envelope
        buckets: Bucket listing capability
        parameters: Parameter listing and lookup capability

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    @app.get("/buckets")
    @remote_call(error_status=500)
    def list_buckets():
        return envelope(version, buckets.list_bucket_names())

    @app.get("/parameters")
    @remote_call(error_status=500)
    def list_parameters():
        return envelope(version, parameters.list_parameter_names())

    # Any Parameter Store failure is reported as not found
    @app.get("/parameters/<name>")
    @remote_call(error_status=404)
    def get_parameter(name):
        return envelope(version, parameters.get_parameter_value(name))

    @app.get("/livez")
    def livez():
        return Response(status=200)

    return app
