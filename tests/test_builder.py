import pytest

from designpatterns.builder import (
    BrickHouseBuilder,
    Car,
    CarStudio,
    House,
    HouseDirector,
    WoodenHouseBuilder,
)


def test_builder_car():
    builder = CarStudio()
    builder.brand("sky").speed(120).engine("audi")
    car = builder.build()
    assert car.brand == "sky"
    assert car.max_speed == 120
    assert car.engine == "audi"
    assert car.wheel == 0


def test_builder_car_more(capsys):
    builder = CarStudio()
    builder.brand("land").speed(110).engine("bmw")
    builder.engine("man made").brand("panda").wheel(15)
    car = builder.build()

    assert car.brand == "panda"
    assert car.max_speed == 110
    assert car == Car(wheel=15, engine="man made", max_speed=110, brand="panda")

    car.brief()
    err = capsys.readouterr().err
    assert err == (
        "Brand:  panda\n"
        "MaxSpeed:  110\n"
        "Engine:  man made\n"
        "Wheel:  15\n"
    )


def test_built_car_is_independent_of_builder():
    builder = CarStudio().brand("sky")
    first = builder.build()
    builder.brand("other")
    assert first.brand == "sky"
    assert builder.build().brand == "other"


def test_builder_house_wooden():
    wooden = WoodenHouseBuilder()
    director = HouseDirector(builder=wooden)
    director.construct_house()

    house = wooden.house
    assert house.walls == "木墙"
    assert house.door == "木门"
    assert house.windows == "木窗"
    assert house.has_garage


def test_builder_house_brick():
    director = HouseDirector()
    director.builder = BrickHouseBuilder()
    house = director.construct_house()
    assert house == House(walls="砖墙", door="铁门", windows="玻璃窗", has_garage=False)


def test_director_without_builder_raises():
    with pytest.raises(ValueError):
        HouseDirector().construct_house()


def test_house_show(capsys):
    House(walls="木墙", door="木门", windows="木窗", has_garage=True).show()
    out = capsys.readouterr().out
    assert out == "房屋结构：墙壁=木墙, 门=木门, 窗户=木窗, 车库=true\n"