"""Transcript parsing, dispatch, clipping and the check pipeline"""
