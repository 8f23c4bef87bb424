"""GitHub annual review"""
