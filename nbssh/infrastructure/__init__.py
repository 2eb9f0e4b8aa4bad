"""Infrastructure helpers"""
