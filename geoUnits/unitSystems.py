from dataclasses import dataclass


@dataclass
class SI:
    """
    SI Units Class

    This class defines the coherent SI units, which are also the base units
    every Quantity stores its value in.
    """
    units = {
        'SCALAR': 'unitless',
        'LENGTH': 'm',                     # Meter
        'MASS': 'kg',                      # Kilogram
        'TIME': 's',                       # Second
        'CURRENT': 'A',                    # Ampere
        'TEMPERATURE': 'K',                # Kelvin
        'AMOUNT': 'mol',                   # Mole
        'LUMINOSITY': 'cd',                # Candela
        'AREA': 'm²',                      # Square meter
        'VOLUME': 'm³',                    # Cubic meter
        'VELOCITY': 'm/s',                 # Meter per second
        'ACCELERATION': 'm/s²',            # Meter per second squared
        'FORCE': 'N',                      # Newton
        'ENERGY': 'J',                     # Joule
        'POWER': 'W',                      # Watt
        'PRESSURE': 'Pa',                  # Pascal
        'FREQUENCY': 'Hz',                 # Hertz
        'DENSITY': 'kg/m³',                # Kilogram per cubic meter
        'MASSFLOW': 'kg/s',                # Kilogram per second
    }


@dataclass
class ENGLISH:
    """
    English Units Class

    This class defines the standard units used in the English unit system
    for various physical quantities.
    """
    units = {
        'SCALAR': 'unitless',
        'LENGTH': 'in',                    # Inch
        'MASS': 'lb',                      # Pound
        'TIME': 's',                       # Second
        'CURRENT': 'A',                    # Ampere
        'TEMPERATURE': '°R',               # Rankine
        'AMOUNT': 'lbmol',                 # Pound-mole
        'LUMINOSITY': 'cd',                # Candela
        'AREA': 'in²',                     # Square inch
        'VOLUME': 'in³',                   # Cubic inch
        'VELOCITY': 'ft/s',                # Feet per second
        'ACCELERATION': 'ft/s²',           # Feet per second squared
        'FORCE': 'lbf',                    # Pound force
        'ENERGY': 'Btu',                   # British thermal unit
        'POWER': 'Btu/s',                  # British thermal unit per second
        'PRESSURE': 'psi',                 # Pounds per square inch
        'FREQUENCY': 'Hz',                 # Hertz
        'DENSITY': 'lb/in³',               # Pound per cubic inch
        'MASSFLOW': 'lb/s',                # Pound per second
    }


@dataclass
class MIXED:
    """
    Mixed Units Class

    This class defines a mix of SI and English units used for various
    physical quantities.
    """
    units = {
        'SCALAR': 'unitless',
        'LENGTH': 'in',                    # Inch
        'MASS': 'lb',                      # Pound
        'TIME': 's',                       # Second
        'CURRENT': 'A',                    # Ampere
        'TEMPERATURE': '°C',               # Celsius
        'AMOUNT': 'mol',                   # Mole
        'LUMINOSITY': 'cd',                # Candela
        'AREA': 'in²',                     # Square inch
        'VOLUME': 'in³',                   # Cubic inch
        'VELOCITY': 'm/s',                 # Meter per second
        'ACCELERATION': 'm/s²',            # Meter per second squared
        'FORCE': 'N',                      # Newton
        'ENERGY': 'MJ',                    # Megajoule
        'POWER': 'MW',                     # Megawatt
        'PRESSURE': 'bar',                 # Bar
        'FREQUENCY': 'rpm',                # Revolutions per minute
        'DENSITY': 'kg/m³',                # Kilogram per cubic meter
        'MASSFLOW': 'kg/s',                # Kilogram per second
    }


unitSystems = {'SI': SI, 'ENGLISH': ENGLISH, 'MIXED': MIXED}
