__version__ = '1.0.0'
__date__ = '18-Oct-2026'
