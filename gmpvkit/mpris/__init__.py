"""MPRIS root, Player and TrackList interfaces and the service that exports them."""