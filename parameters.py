#
## Default site and canopy parameters, used when no config file is given
#
lat = -23.575001
lon = 152.524994

lai = 1.5

# leaf angle distribution parameter, carried through but not used by the
# de Pury & Farquhar extinction coefficients (spherical distribution)
lad = 1.0
