"""Collaborator boundaries consumed by the rendering core."""

from push_template_renderer.collaborators.deeplink import (
    DeeplinkAction,
    DeeplinkResolver,
    PassthroughDeeplinkResolver,
)
from push_template_renderer.collaborators.image_fetch import HttpImageFetcher, ImageFetchAdapter
from push_template_renderer.collaborators.sound import SoundPreference, StaticSoundPreference

__all__ = [
    "DeeplinkAction",
    "DeeplinkResolver",
    "HttpImageFetcher",
    "ImageFetchAdapter",
    "PassthroughDeeplinkResolver",
    "SoundPreference",
    "StaticSoundPreference",
]
