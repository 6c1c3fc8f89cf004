from palette_engine.code_generation import color_mode_code, color_mode_value


def test_color_mode_value():
    assert color_mode_value("blue", "100", "800") == 'useColorModeValue("blue.100", "blue.800")'


def test_color_mode_code_two_lines():
    code = color_mode_code("blue", "100", "800", "gray", "900", "50")
    bg_line, text_line = code.split("\n")
    assert bg_line == 'const bg = useColorModeValue("blue.100", "blue.800");'
    assert text_line == 'const textColor = useColorModeValue("gray.900", "gray.50");'
