from querychain.utils import logging

__all__ = ("logging",)
