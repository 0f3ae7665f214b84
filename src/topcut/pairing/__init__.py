from topcut.pairing.swiss import create_swiss_pairings

__all__ = ["create_swiss_pairings"]
