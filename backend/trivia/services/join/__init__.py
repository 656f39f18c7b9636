"""Join helpers: reachable addresses, player URLs, QR codes and the
public relay URL. None of these touch game state and all of them degrade
to local addressing on failure.
"""
