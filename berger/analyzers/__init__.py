"""Per-dimension analyzers, each computing one family of inbox statistics."""