"""mdlinks - follow and create path references found in markdown documents."""
