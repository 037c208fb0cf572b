"""Core domain: models, errors, ports and JMX decoding."""
