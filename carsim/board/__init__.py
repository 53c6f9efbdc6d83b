"""In-memory GPIO board model: lights, pedals, PWM outputs, velocity and cruise control."""