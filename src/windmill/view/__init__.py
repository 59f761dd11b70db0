"""
The VIEW layer paints the windmill and hosts it in Qt widgets.
"""
