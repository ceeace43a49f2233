"""Core building blocks: logging, config, errors, kubectl and argument handling"""
