"""Core domain: value objects, results and exceptions"""
