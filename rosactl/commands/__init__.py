from . import delete, list

__all__ = ['delete', 'list']
