"""
Service layer for AWS operations.

This module provides abstraction over S3, SSM Parameter Store and STS,
separating request handling from infrastructure concerns.
"""
