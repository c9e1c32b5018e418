# File containing shared parameters for rank-approximate sample sizing

# Accept a candidate sample count once its success probability overshoots
# the requested confidence by less than this amount.
probability_tolerance = 0.001

# Extra binary-search iterations allowed on top of 2 * n.bit_length()
search_iteration_slack = 16

# Confidence curve defaults
curve_min_alpha = 0.5
curve_max_alpha = 0.99
curve_num_alpha_points = 20

# Probability curve defaults
curve_num_sample_points = 50

# Environment variable pointing at a TOML logging configuration
log_cfg_env_var = "RA_SAMPLING_LOG_CFG"
