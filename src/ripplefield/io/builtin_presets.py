"""
Built-in preset records.

Records use the flat camelCase layout of preset JSON files. Omitted
keys take their defaults on load and omitted edge colors are derived
from the corners.
"""

BUILTIN_PRESETS = {
    "sunset": {
        "color1": "#FF6B6B", "color2": "#FF8E53", "color3": "#FF8A80", "color4": "#FFAB40",
        "waveCount": 6, "waveAmplitude": 1.2, "waveZoom": 3.8, "waveFrequency": 1.0,
    },
    "ocean": {
        "color1": "#0F4C75", "color2": "#3282B8", "color3": "#1B6EC2", "color4": "#BBE1FA",
        "waveCount": 8, "waveAmplitude": 1.0, "waveZoom": 5.2, "waveFrequency": 1.2,
    },
    "aurora": {
        "color1": "#a8edea", "color2": "#fed6e3", "color3": "#d299c2", "color4": "#fef9d7",
        "color5": "#d3e2e7", "color6": "#e8b8d3", "color7": "#e8c9cd", "color8": "#d3f3e1",
        "waveCount": 5, "waveAmplitude": 1.5, "waveZoom": 3.5, "waveFrequency": 0.8,
        "brightness": -0.21, "contrast": 2.24, "saturation": 2.16,
    },
    "forest": {
        "color1": "#134E5E", "color2": "#71B280", "color3": "#2E8B57", "color4": "#98FB98",
        "waveCount": 4, "waveAmplitude": 0.8, "waveZoom": 6.0, "waveFrequency": 1.0,
    },
    "coral": {
        "color1": "#FF6B9D", "color2": "#F7931E", "color3": "#FFE66D", "color4": "#FF8C42",
        "waveCount": 7, "waveAmplitude": 1.8, "waveZoom": 4.2, "waveFrequency": 1.5,
    },
    "lavender": {
        "color1": "#8755c3", "color2": "#d4a5ff", "color3": "#9063e3", "color4": "#9f7aea",
        "color5": "#debdff", "color6": "#c69dfb", "color7": "#ab87f0", "color8": "#c4a8f5",
        "waveCount": 5, "waveAmplitude": 1.2, "waveZoom": 3.9, "waveFrequency": 0.8,
        "waveSpeed": 0.3, "saturation": 1.55,
    },
    "citrus": {
        "color1": "#FFD93D", "color2": "#FF8008", "color3": "#6BCF7F", "color4": "#4D9DE0",
        "waveCount": 6, "waveAmplitude": 2.1, "waveFrequency": 5.8,
    },
    "midnight": {
        "color1": "#1A1A2E", "color2": "#16213E", "color3": "#0F3460", "color4": "#533483",
        "waveCount": 4, "waveAmplitude": 0.9, "waveFrequency": 2.2,
    },
    "peach": {
        "color1": "#FFBE0B", "color2": "#FB5607", "color3": "#FF8CC8", "color4": "#FFCFD2",
        "waveCount": 8, "waveAmplitude": 1.5, "waveFrequency": 4.1,
    },
    "emerald": {
        "color1": "#D5F2E3", "color2": "#73BBA3", "color3": "#42A5B3", "color4": "#0E8388",
        "waveCount": 6, "waveAmplitude": 1.2, "waveFrequency": 4.8,
    },
    "rose": {
        "color1": "#F8BBD9", "color2": "#E29578", "color3": "#FFDAB9", "color4": "#F4A261",
        "waveCount": 5, "waveAmplitude": 1.8, "waveFrequency": 3.7,
    },
    "azure": {
        "color1": "#E0F2F1", "color2": "#80CBC4", "color3": "#4FC3F7", "color4": "#29B6F6",
        "waveCount": 7, "waveAmplitude": 2.4, "waveFrequency": 6.2,
    },
    "charcoal": {
        "color1": "#2C2C2C", "color2": "#404040", "color3": "#1A1A1A", "color4": "#595959",
        "waveCount": 5, "waveAmplitude": 0.6, "waveFrequency": 3.8,
    },
    "slate": {
        "color1": "#2F3349", "color2": "#1E2139", "color3": "#3C415C", "color4": "#51566E",
        "waveCount": 6, "waveAmplitude": 0.9, "waveFrequency": 4.1,
    },
    "graphite": {
        "color1": "#36454f", "color2": "#2f4f4f", "color3": "#1c1c1c", "color4": "#4a4a4a",
        "color5": "#334a4f", "color6": "#263636", "color7": "#333333", "color8": "#40484d",
        "waveCount": 4, "waveAmplitude": 0.75, "waveZoom": 4.5, "waveFrequency": 3,
        "filmEffect": 3, "caAmount": 0.0085,
        "contrast": 1.35, "saturation": 0.58,
    },
    "film-noir": {
        "color1": "#0d0d0d", "color2": "#2a2a2a", "color3": "#000000", "color4": "#1f1f1f",
        "color5": "#1c1c1c", "color6": "#151515", "color7": "#101010", "color8": "#161616",
        "waveCount": 4, "waveAmplitude": 1.2, "waveZoom": 4.5, "waveFrequency": 2,
        "waveSpeed": 0.2, "directionDrift": 0.6,
        "brightness": 0.18, "contrast": 1.81, "saturation": 1.99,
    },
    "storm": {
        "color1": "#4B5563", "color2": "#374151", "color3": "#1F2937", "color4": "#6B7280",
        "waveCount": 7, "waveAmplitude": 1.5, "waveFrequency": 4.3,
    },
    "carbon": {
        "color1": "#1A1A1A", "color2": "#2D2D30", "color3": "#0A0A0A", "color4": "#3A3A3C",
        "waveCount": 8, "waveAmplitude": 0.45, "waveFrequency": 7.5,
    },
    "pewter": {
        "color1": "#696969", "color2": "#4A4458", "color3": "#36454F", "color4": "#5D5D5D",
        "waveCount": 5, "waveAmplitude": 1.05, "waveFrequency": 3.9,
    },
    "dusk": {
        "color1": "#99624d", "color2": "#4a3728", "color3": "#1a1a2e", "color4": "#3d2914",
        "color5": "#3b281c", "color6": "#32292b", "color7": "#2c2221", "color8": "#803700",
        "waveCount": 6, "waveAmplitude": 1.35, "waveZoom": 4.5, "waveFrequency": 3,
        "waveSpeed": 0.7, "directionDrift": 1,
    },
    "cyberpunk": {
        "color1": "#FF0080", "color2": "#00FFFF", "color3": "#FF6600", "color4": "#8000FF",
        "color5": "#FF40BF", "color6": "#80CC80", "color7": "#FF9933", "color8": "#BF40BF",
        "waveCount": 8, "waveAmplitude": 2.2, "waveZoom": 6.5, "waveFrequency": 1.8,
        "waveTwirl": 0.120, "twirlSources": 4, "twirlLocation": 1, "waveSpeed": 2.5,
        "filmEffect": 4, "bloomIntensity": 0.6,
    },
    "ethereal": {
        "color1": "#e8d5ff", "color2": "#c8a2c8", "color3": "#b794f6", "color4": "#a0c4ff",
        "color5": "#d8bce4", "color6": "#c09bdf", "color7": "#36367d", "color8": "#c4cdff",
        "waveCount": 5, "waveAmplitude": 1.8, "waveZoom": 4.2, "waveFrequency": 0.9,
        "waveTwirl": 0.080, "twirlSources": 2, "waveSpeed": 1.2,
        "filmEffect": 4, "bloomIntensity": 0.05,
    },
    "vintage": {
        "color1": "#D4A574", "color2": "#381D0B", "color3": "#F4A460", "color4": "#7500EB",
        "waveCount": 6, "waveAmplitude": 1.4, "waveZoom": 3.8, "waveFrequency": 1.1,
        "waveTwirl": 0.040, "waveSpeed": 0.8,
        "blendMode": 1, "filmEffect": 1, "filmNoiseIntensity": 0.187,
    },
    "neon": {
        "color1": "#39FF14", "color2": "#FF073A", "color3": "#00E5FF", "color4": "#FFD700",
        "waveCount": 10, "waveAmplitude": 2.8, "waveZoom": 7.2, "waveFrequency": 2.2,
        "waveTwirl": 0.150, "twirlSources": 6, "twirlLocation": 1, "waveSpeed": 2.8,
        "blendMode": 2, "filmEffect": 3, "caAmount": 0.012,
    },
    "turbulent-skies": {
        "color1": "#092232", "color2": "#3e9cdbff", "color3": "#5DADE2", "color4": "#1F618D",
        "waveCount": 4, "waveAmplitude": 1.8, "waveZoom": 5.8, "waveFrequency": 1.2,
        "waveTwirl": 0.161, "twirlSources": 4, "twirlLocation": 1, "waveSpeed": 1.4,
        "turbulence": 0.7, "phaseRandomness": 1.2, "amplitudeVariation": 1.0, "directionDrift": 0.2,
        "filmEffect": 2,
    },
    "grainy-film": {
        "color1": "#171717", "color2": "#CFC6B8", "color3": "#d46f02", "color4": "#8E7F71",
        "waveCount": 4, "waveAmplitude": 0.6, "waveZoom": 3.0, "waveFrequency": 2.0,
        "waveTwirl": 0.118, "waveSpeed": 1.3,
        "turbulence": 0.15, "noiseDisplacement": 0.05, "amplitudeVariation": 0.2,
        "blendMode": 1, "filmEffect": 1, "filmNoiseIntensity": 0.200,
    },
    "phase-shift": {
        "color1": "#FF6B6B", "color2": "#FFD93D", "color3": "#6BCB77", "color4": "#4D9DE0",
        "waveCount": 7, "waveAmplitude": 1.6, "waveZoom": 5.0, "waveFrequency": 1.4,
        "waveTwirl": 0.080, "twirlSources": 2, "waveSpeed": 1.8,
        "phaseRandomness": 2.5, "amplitudeVariation": 0.6, "directionDrift": 0.4, "noiseDisplacement": 0.12,
        "blendMode": 2, "filmEffect": 3,
    },
    "directional-flow": {
        "color1": "#FFF1B8", "color2": "#FFD6A5", "color3": "#FFB4A2", "color4": "#E5989B",
        "waveCount": 5, "waveAmplitude": 1.1, "waveZoom": 4.6, "waveFrequency": 1.0,
        "waveTwirl": 0.030, "waveSpeed": 1.2,
        "directionDrift": 1.5, "phaseRandomness": 0.8, "amplitudeVariation": 0.5,
        "turbulence": 0.2, "noiseDisplacement": 0.08,
    },
    "copper-mineral": {
        "color1": "#200809", "color2": "#0d4946", "color3": "#6c401c", "color4": "#1e639c",
        "color5": "#172928", "color6": "#3d4531", "color7": "#45525c", "color8": "#1f3653",
        "waveCount": 9, "waveAmplitude": 0.65, "waveZoom": 8.2, "waveFrequency": 1.5,
        "waveTwirl": 0.019, "twirlSources": 6, "waveSpeed": 0.5,
        "phaseRandomness": 2.8, "directionDrift": 0.1,
        "filmEffect": 2, "toneMappingLUT": 7,
    },
    "chaos-storm": {
        "color1": "#3A0CA3", "color2": "#F72585", "color3": "#FF8906", "color4": "#2EC4B6",
        "waveCount": 12, "waveAmplitude": 2.8, "waveZoom": 8.0, "waveFrequency": 2.8,
        "waveTwirl": 0.220, "twirlSources": 6, "twirlLocation": 1, "waveSpeed": 2.4,
        "turbulence": 0.6, "noiseDisplacement": 0.25, "phaseRandomness": 1.8,
        "amplitudeVariation": 2.2, "directionDrift": 0.9,
        "blendMode": 3, "filmEffect": 3, "bloomIntensity": 0.4,
    },
    "cosmic": {
        "color1": "#1A0B3D", "color2": "#6A0DAD", "color3": "#9932CC", "color4": "#00CED1",
        "waveCount": 7, "waveAmplitude": 3.2, "waveZoom": 5.8, "waveFrequency": 1.6,
        "waveTwirl": 0.180, "twirlSources": 3, "twirlLocation": 1, "waveSpeed": 1.8,
        "blendMode": 3, "filmEffect": 2, "toneMappingLUT": 3,
    },
    "retro": {
        "color1": "#FF6B35", "color2": "#F7931E", "color3": "#FFD23F", "color4": "#06FFA5",
        "waveCount": 4, "waveAmplitude": 1.6, "waveZoom": 3.2, "waveFrequency": 1.3,
        "waveTwirl": 0.060, "waveSpeed": 1.5,
        "filmEffect": 1, "filmNoiseIntensity": 0.200,
    },
    "intense-torrent": {
        "color1": "#321f77", "color2": "#c62bc1", "color3": "#f16c90", "color4": "#daaeee",
        "color5": "#7c259c", "color6": "#dc4ca9", "color7": "#e68dbf", "color8": "#8667b3",
        "waveCount": 6, "waveAmplitude": 2.2, "waveZoom": 9.1, "waveFrequency": 1.2,
        "waveTwirl": 0.003, "twirlSources": 5, "twirlLocation": 1, "waveSpeed": 3,
        "phaseRandomness": 1.8, "directionDrift": 1.5,
        "blendMode": 3, "filmEffect": 3, "caAmount": 0.0155,
    },
    "auroris-borealis": {
        "color1": "#041506", "color2": "#44103f", "color3": "#1a7851", "color4": "#982756",
        "color5": "#241323", "color6": "#2f4448", "color7": "#595054", "color8": "#4e1e2e",
        "waveCount": 10, "waveAmplitude": 3.55, "waveZoom": 3.0, "waveFrequency": 0.6,
        "waveTwirl": 0.030, "twirlSources": 3, "waveSpeed": 1,
        "phaseRandomness": 0.7, "directionDrift": 1.6,
        "filmEffect": 4, "bloomIntensity": 0.77,
    },
    "energetic-fantasy": {
        "color1": "#832133", "color2": "#cb8f27", "color3": "#830c0c", "color4": "#f1c0ac",
        "color5": "#a7582d", "color6": "#c1be3a", "color7": "#d4d77c", "color8": "#ba7170",
        "waveCount": 13, "waveAmplitude": 1, "waveZoom": 11.9, "waveFrequency": 2.4,
        "waveTwirl": 0.065, "twirlSources": 4, "twirlLocation": 1, "waveSpeed": 1.9,
        "phaseRandomness": 0.1, "directionDrift": 1.1,
        "filmEffect": 1, "filmNoiseIntensity": 0.153,
    },
    "cardinal-motion": {
        "color1": "#2f0b18", "color2": "#4e1015", "color3": "#862713", "color4": "#9c122e",
        "color5": "#3f0e17", "color6": "#6a1c14", "color7": "#911d21", "color8": "#660f23",
        "waveCount": 16, "waveAmplitude": 3.25, "waveZoom": 10.9, "waveFrequency": 2.6,
        "waveTwirl": 0.139, "twirlSources": 5, "twirlLocation": 1, "waveSpeed": 1.1,
        "phaseRandomness": 0.6, "directionDrift": 1.2,
        "filmEffect": 4, "bloomIntensity": 0.26,
        "saturation": 2.65,
    },
    "amethyst-flow": {
        "color1": "#2e3460", "color2": "#b61a56", "color3": "#55d0e1", "color4": "#f9c2bb",
        "color5": "#63414e", "color6": "#86759c", "color7": "#a7c9ce", "color8": "#859581",
        "waveCount": 5, "waveAmplitude": 4, "waveZoom": 0.7, "waveFrequency": 0.4,
        "waveTwirl": 0.061, "twirlSources": 2, "waveSpeed": 0.8,
        "phaseRandomness": 0.7, "directionDrift": 1,
        "brightness": -0.27, "contrast": 1.84, "saturation": 2.32,
    },
    "blusteel-maelstrom": {
        "color1": "#1d1a68", "color2": "#9530d3", "color3": "#d98ed0", "color4": "#bda7e3",
        "color5": "#59259e", "color6": "#b75fd2", "color7": "#cb9bda", "color8": "#6d61a6",
        "waveCount": 12, "waveAmplitude": 0.95, "waveZoom": 8.4, "waveFrequency": 1.3,
        "waveTwirl": 0.075, "waveSpeed": 0.9,
        "phaseRandomness": 0.8, "directionDrift": 1,
        "blendMode": 1, "filmEffect": 4, "bloomIntensity": 0.72,
        "brightness": -0.27, "contrast": 1.84, "saturation": 1.45,
    },
    "breathing-current": {
        "color1": "#213a85", "color2": "#802fbe", "color3": "#090207", "color4": "#7751d2",
        "color5": "#5135a2", "color6": "#b656c6", "color7": "#c682e4", "color8": "#6161c0",
        "waveCount": 16, "waveAmplitude": 2.35, "waveZoom": 9.5, "waveFrequency": 0.2,
        "waveTwirl": 0.016, "twirlSources": 6, "twirlLocation": 1, "waveSpeed": 3,
        "phaseRandomness": 2.5, "directionDrift": 0.2,
        "blendMode": 3, "filmEffect": 4, "bloomIntensity": 0.44,
    },
    "fire-serpent": {
        "color1": "#480c05", "color2": "#030303", "color3": "#48577f", "color4": "#2c1616",
        "color5": "#645a57", "color6": "#956e41", "color7": "#d67d29", "color8": "#000000",
        "waveCount": 16, "waveAmplitude": 4, "waveZoom": 1.5, "waveFrequency": 1,
        "waveTwirl": 0.056, "twirlSources": 3, "waveSpeed": 0.4,
        "phaseRandomness": 2, "amplitudeVariation": 0.95, "directionDrift": 0.7,
        "blendMode": 3, "filmEffect": 1, "filmNoiseIntensity": 0.135,
    },
    "arctic-pulse": {
        "color1": "#185081", "color2": "#461bb3", "color3": "#e480e6", "color4": "#9299f8",
        "color5": "#2f369a", "color6": "#954ecd", "color7": "#bb8def", "color8": "#5575bd",
        "waveCount": 9, "waveAmplitude": 2.65, "waveZoom": 1.8, "waveFrequency": 2.3,
        "waveTwirl": 0.136, "twirlSources": 6, "twirlLocation": 1, "waveSpeed": 0.9,
        "phaseRandomness": 0.8, "directionDrift": 0.9,
        "filmEffect": 4, "bloomIntensity": 0.66,
    },
    "violet-flow": {
        "color1": "#7c0a49", "color2": "#d71446", "color3": "#ee4d4f", "color4": "#f198ba",
        "color5": "#aa0f48", "color6": "#e3314b", "color7": "#f07385", "color8": "#b75182",
        "waveCount": 10, "waveAmplitude": 2.95, "waveZoom": 7.8, "waveFrequency": 2,
        "waveTwirl": 0.121, "twirlSources": 2, "twirlLocation": 1, "waveSpeed": 0.5,
        "phaseRandomness": 2.7, "directionDrift": 1.4,
        "filmEffect": 4, "bloomIntensity": 0.69,
    },
    "bluecurl-shimmer": {
        "color1": "#061d1c", "color2": "#10333e", "color3": "#204972", "color4": "#24838f",
        "color5": "#0b282d", "color6": "#183e58", "color7": "#226681", "color8": "#155056",
        "waveCount": 13, "waveAmplitude": 3.95, "waveZoom": 4.7, "waveFrequency": 0.9,
        "waveTwirl": 0.165, "twirlLocation": 1, "waveSpeed": 0.5,
        "phaseRandomness": 2.2, "directionDrift": 0.6,
        "filmEffect": 1, "filmNoiseIntensity": 0.120,
        "saturation": 2.38,
    },
    "wild-blend": {
        "color1": "#096f6f", "color2": "#f11818", "color3": "#7cb7f2", "color4": "#061811",
        "color5": "#7d4444", "color6": "#b76885", "color7": "#b5c1cc", "color8": "#7b9d8b",
        "waveCount": 13, "waveAmplitude": 3.95, "waveZoom": 2.8, "waveFrequency": 0.9,
        "waveTwirl": 0.165, "twirlLocation": 1, "waveSpeed": 0.5,
        "phaseRandomness": 2.2, "directionDrift": 0.6,
        "filmEffect": 1, "filmNoiseIntensity": 0.120,
        "saturation": 2.38,
    },
    "ink-spiral": {
        "color1": "#0f061a", "color2": "#351045", "color3": "#6b156e", "color4": "#611498",
        "color5": "#220b30", "color6": "#50135a", "color7": "#661583", "color8": "#380d59",
        "waveCount": 14, "waveAmplitude": 0.75, "waveZoom": 2.5, "waveFrequency": 0.7,
        "waveTwirl": 0.193, "twirlSources": 2, "twirlLocation": 2, "waveSpeed": 0.5,
        "phaseRandomness": 1, "directionDrift": 1.8,
        "filmEffect": 4, "bloomIntensity": 0.42,
    },
    "amethyst-harmony": {
        "color1": "#0c3614", "color2": "#6c105c", "color3": "#12825f", "color4": "#c90744",
        "color5": "#3c2338", "color6": "#3f495e", "color7": "#6e4552", "color8": "#6b1f2c",
        "waveCount": 11, "waveAmplitude": 1.9, "waveZoom": 8.2, "waveFrequency": 1.5,
        "waveTwirl": 0.164, "twirlSources": 5, "twirlLocation": 1, "waveSpeed": 0.6,
        "phaseRandomness": 1.7, "directionDrift": 1.6,
        "blendMode": 2, "filmEffect": 3, "caAmount": 0.0160,
    },
    "cosmic-maelstrom": {
        "color1": "#062358", "color2": "#6e22c4", "color3": "#f257d8", "color4": "#9a8ff3",
        "color5": "#3a238e", "color6": "#b03dce", "color7": "#c673e6", "color8": "#5059a6",
        "waveCount": 8, "waveAmplitude": 6.35, "waveZoom": 7, "waveFrequency": 0.2,
        "waveTwirl": 0.020, "twirlSources": 4, "waveSpeed": 1.8,
        "phaseRandomness": 0.5, "directionDrift": 0.1,
        "blendMode": 3, "filmEffect": 4, "bloomIntensity": 0.66,
        "brightness": -0.02,
    },
    "tidal-waltz": {
        "color1": "#113275", "color2": "#7923d5", "color3": "#e18fd2", "color4": "#c3bdea",
        "color5": "#452ba5", "color6": "#ad59d4", "color7": "#d2a6de", "color8": "#6a78b0",
        "waveCount": 15, "waveAmplitude": 2.2, "waveZoom": 10.4, "waveFrequency": 2.2,
        "waveTwirl": 0.086, "twirlSources": 2, "twirlLocation": 2, "waveSpeed": 0.4,
        "phaseRandomness": 2.5, "amplitudeVariation": 1.25, "directionDrift": 1.3,
        "filmEffect": 4, "bloomIntensity": 0.34,
    },
    "ocean-soot": {
        "color1": "#041610", "color2": "#0d2640", "color3": "#321a93", "color4": "#2a8a9b",
        "color5": "#091e28", "color6": "#20206a", "color7": "#2e5297", "color8": "#175056",
        "waveCount": 11, "waveAmplitude": 4.1, "waveZoom": 4.6, "waveFrequency": 3,
        "waveTwirl": 0.117, "twirlSources": 4, "twirlLocation": 1, "waveSpeed": 0.4,
        "phaseRandomness": 2.5, "directionDrift": 0.2,
        "blendMode": 2, "filmEffect": 2, "toneMappingLUT": 5,
    },
    "lavender-swirly-swirl": {
        "color1": "#050818", "color2": "#290e5c", "color3": "#661f7d", "color4": "#2d1e86",
        "color5": "#170b3a", "color6": "#48176d", "color7": "#4a1f82", "color8": "#19134f",
        "waveCount": 10, "waveAmplitude": 1.15, "waveZoom": 2.7, "waveFrequency": 0.5,
        "waveTwirl": 0.086, "twirlSources": 5, "waveSpeed": 1.6,
        "phaseRandomness": 0.2, "directionDrift": 1.6,
        "filmEffect": 5, "lensDistortion": -1.46,
        "brightness": -0.02,
    },
}

# Keys whose title-cased form reads badly
SPECIAL_DISPLAY_NAMES = {
    "auroris-borealis": "Aurora Borealis",
    "film-noir": "Film Noir",
    "lavender-swirly-swirl": "Lavender Swirl",
}
