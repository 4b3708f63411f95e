"""Flat-file persistence"""
from .store import FlatRecordStore, Record
from .repository import BaseRepository

__all__ = ['FlatRecordStore', 'Record', 'BaseRepository']
