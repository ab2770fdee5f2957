"""Pipeline orchestration and collaborator protocols."""
