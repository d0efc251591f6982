APP_NAME = "assoc_files"
DEFAULT_PLAN_FILENAME = "assoc-files.yaml"
