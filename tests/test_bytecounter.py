from progbook.bytecounter import ByteCounter, main


def test_write_bytes():
    c = ByteCounter()
    assert c.write(b"hello") == 5
    assert int(c) == 5


def test_accumulates():
    c = ByteCounter()
    c.write(b"ab")
    c.write(b"cde")
    assert c.count == 5


def test_text_counts_encoded_bytes():
    c = ByteCounter()
    c.write("é")
    assert c.count == len("é".encode())


def test_main(capsys):
    main([])
    assert capsys.readouterr().out == "5\n12\n"