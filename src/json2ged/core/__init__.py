"""Conversion orchestration: context, pipeline, and error hierarchy."""
