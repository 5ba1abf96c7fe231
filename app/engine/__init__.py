"""
Training load analytics engine.

Pure, synchronous computations: session load, daily resampling, the
CTL / ATL / TSB / ACWR model, zone classification, readiness estimates
and norm-referenced test evaluation.  Import from the submodules
directly.
"""
