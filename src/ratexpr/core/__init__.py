"""ratexpr core: IR, errors, configuration and the expression language."""
