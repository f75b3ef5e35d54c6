number = "0.4.0"
