# Models module
