"""MaintTrack - maintenance tracking for IT equipment, peripherals and tickets."""

__version__ = "0.1.0"
