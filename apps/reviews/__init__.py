"""Reviews app: product reviews and reviews between rental parties."""
