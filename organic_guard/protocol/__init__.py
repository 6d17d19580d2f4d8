"""ALN particles, sovereign channels and legacy protocol gateways."""