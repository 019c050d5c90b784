"""Statistics and monitoring tests"""
