"""Sample corpora shipped with textdtm."""
