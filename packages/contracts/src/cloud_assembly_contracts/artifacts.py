from __future__ import annotations

from enum import StrEnum
from typing import Final

from .resources import schema_version_text

MANIFEST_FILE: Final[str] = "manifest.json"
BUILD_FILE: Final[str] = "build.json"

PROTO_RESPONSE_VERSION: Final[str] = schema_version_text()


class ArtifactType(StrEnum):
    AWS_CLOUDFORMATION_STACK = "aws:cloudformation:stack"
    AWS_ECR_DOCKER_IMAGE = "aws:ecr:image"
    AWS_S3_OBJECT = "aws:s3:object"
