"""
CPU slope kernels for the regression estimators.

    cpu_ls: least squares (pinv, left division, SVD, Tikhonov, truncated SVD)
    cpu_lad: least absolute deviations as linear programs
"""
