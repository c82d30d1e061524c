"""Service-layer entry points for costcrop."""

from .pipeline_service import PipelineService, build_default_pipeline_service, build_pipeline_service

__all__ = ["PipelineService", "build_default_pipeline_service", "build_pipeline_service"]
