# -*- coding: utf-8 -*-
"""Utility modules."""

from push_template_renderer.utils.image_format import detect_image_format, is_http_url

__all__ = ["detect_image_format", "is_http_url"]
