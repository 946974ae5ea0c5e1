import os

# Root paths resolve automatically and can be overridden through the environment
ROOT = os.environ.get("TRUSTNET_ROOT", os.path.abspath(os.path.join(__file__, "../../../")))
DATA_ROOT = os.environ.get("DATA_ROOT", os.path.join(ROOT, "data"))
RESULTS_ROOT = os.environ.get("RESULTS_ROOT", os.path.join(ROOT, "results"))

DATASET_CSV = os.environ.get("TRUSTNET_DATASET", os.path.join(DATA_ROOT, "soc-sign-bitcoinotc.csv"))
SCORES_CSV = os.environ.get("TRUSTNET_SCORES", os.path.join(RESULTS_ROOT, "trust_scores.csv"))

GENERATION = int(os.environ.get("TRUSTNET_GENERATION", "3"))

# rows below the average or above the spread are flagged untrusted
AVG_THRESHOLD = float(os.environ.get("TRUSTNET_AVG_THRESHOLD", "6.0"))
STDDEV_THRESHOLD = float(os.environ.get("TRUSTNET_STDDEV_THRESHOLD", "2.2"))
