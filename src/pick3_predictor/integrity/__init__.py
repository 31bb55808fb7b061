"""Checksum codecs used to stamp predictions."""
