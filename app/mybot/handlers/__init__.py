# -*- coding: utf-8 -*-

from .dispatcher import dispatch_update, classify_update

__all__ = ["dispatch_update", "classify_update"]
