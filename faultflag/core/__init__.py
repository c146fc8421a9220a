# faultflag/core/__init__.py
